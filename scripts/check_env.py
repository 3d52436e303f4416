"""CLI helper to validate the environment configuration.

Usage::

    python -m scripts.check_env

It imports :mod:`adaptlearn.core.config` and reports any validation errors in
a readable format, exiting with status code 1 when something is invalid.
"""

from __future__ import annotations

import sys

from pydantic import ValidationError

try:
    from adaptlearn.core.config import settings
except ValidationError:
    # ``adaptlearn.core.config`` already prints a detailed error summary, so we
    # only need to set a non-zero exit code here.
    print("Environment validation failed – see details above.", file=sys.stderr)
    sys.exit(1)
else:
    print("Environment variables OK.")
    for name, value in settings.model_dump().items():
        if "url" in name.lower() and value and "@" in str(value):
            print(f"- {name}: <hidden>")
        else:
            print(f"- {name}: {value}")
