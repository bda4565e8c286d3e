from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared sample documents used across unit and integration tests.
"""

import os
import sys
from typing import Any, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def deep_document() -> Dict[str, Any]:
    """
    Return a five-level project layout.

    Structure:
    src
      components
        Button.tsx
        Input.tsx
          types
            props.ts
            state.ts
      utils
        helpers
          format.ts
          validate.ts
            rules
              email.ts
              phone.ts
    tests
      unit
        components
          Button.test.tsx
    """
    return {
        "src": {
            "components": {
                "Button.tsx": {},
                "Input.tsx": {
                    "types": {
                        "props.ts": {},
                        "state.ts": {},
                    },
                },
            },
            "utils": {
                "helpers": {
                    "format.ts": {},
                    "validate.ts": {
                        "rules": {
                            "email.ts": {},
                            "phone.ts": {},
                        },
                    },
                },
            },
        },
        "tests": {
            "unit": {
                "components": {
                    "Button.test.tsx": {},
                },
            },
        },
    }


@pytest.fixture
def small_document() -> Dict[str, Any]:
    """Return the two-level layout used in the documentation examples."""
    return {"src": {"a.ts": {}, "b.ts": {}}, "tests": {}}
