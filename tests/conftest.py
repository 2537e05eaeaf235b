"""Shared test fixtures for openapi-arrangement.

Provides the sample documents used across the ordering, parser and CLI
tests. Documents are written as YAML and parsed with PyYAML so that key
order matches what a real loader produces.
"""

from __future__ import annotations

import textwrap
from typing import Any

import pytest
import yaml

from openapi_arrangement.output import reset_output


# ---------------------------------------------------------------------------
# Auto-reset global output state between tests
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_output_between_tests() -> None:
    """Reset the global OutputManager after every test.

    The OutputManager caches references to sys.stdout/sys.stderr at
    creation time, which go stale once CliRunner restores the streams.
    """
    yield
    reset_output()


def parse_yaml(text: str) -> Any:
    """Parse an indented YAML literal."""
    return yaml.safe_load(textwrap.dedent(text))


# Schema names are used directly as $ref values.
LOOPS_YAML = """\
    components:
      schemas:
        Solo:
          foo: bar
        RefSolo:
          properties:
            foo:
              $ref: Solo
        Second:
          type: something
          properties:
            foo:
              $ref: Solo
        LoopA:
          allOf:
          - $ref: Second
          - $ref: LoopB
        LoopB:
          anyOf:
          - $ref: LoopA
          - $ref: Solo
        LoopC:
          properties:
            foo:
              $ref: LoopD
        LoopD:
          properties:
            foo:
              $ref: LoopE
        LoopE:
          properties:
            foo:
              $ref: LoopC
        Loop1:
          properties:
            foo:
              $ref: Loop2
        Loop6:
          properties:
            foo:
              $ref: Loop1
        Loop2:
          properties:
            foo:
              $ref: Loop3
        Loop5:
          properties:
            foo:
              $ref: Loop6
        Loop3:
          properties:
            foo:
              $ref: Loop4
        Loop4:
          properties:
            foo:
              $ref: Loop5
    """


PETSTORE_YAML = """\
    openapi: "3.0.3"
    info:
      title: Petstore
      version: "1.0.0"
    paths: {}
    components:
      schemas:
        Pet:
          allOf:
          - $ref: "#/components/schemas/NewPet"
          - $ref: "#/components/schemas/PetId"
        NewPet:
          type: object
          required: [name]
          properties:
            name:
              type: string
            owner:
              $ref: "#/components/schemas/Owner"
        PetId:
          type: integer
        Owner:
          type: object
          required: [address]
          properties:
            address:
              $ref: "#/components/schemas/Address"
            pets:
              $ref: "#/components/schemas/Pet"
        Address:
          type: object
          properties:
            street:
              type: string
    """


@pytest.fixture
def loops_doc() -> dict[str, Any]:
    """Document whose schemas reference each other by bare name."""
    return parse_yaml(LOOPS_YAML)


@pytest.fixture
def petstore_doc() -> dict[str, Any]:
    """OpenAPI document whose schemas reference each other by full $ref."""
    return parse_yaml(PETSTORE_YAML)
