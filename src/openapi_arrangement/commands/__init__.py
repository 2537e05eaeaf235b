"""Built-in CLI commands.

* :func:`~openapi_arrangement.commands.order.order_command` -- ``order``
* :func:`~openapi_arrangement.commands.order.refs_command` -- ``refs``
"""

from openapi_arrangement.commands.order import order_command, refs_command

__all__ = ["order_command", "refs_command"]
