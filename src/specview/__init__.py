"""specview -- Browse OpenAPI 3.0/3.1 descriptions interactively in the terminal.

This package loads an OpenAPI document (JSON or YAML), flattens it into a
sorted list of endpoints, and lets the user page through them in a two-pane
terminal browser with a live path filter.

Typical workflow::

    specview browse openapi.yaml      # interactive browser
    specview paths openapi.yaml -f user  # scriptable listing

Modules:
    app: Typer application factory and CLI entry point.
    models: Pydantic models shared across the entire package.
    config: XDG-aware viewer configuration with precedence resolution.
    exceptions: Exception hierarchy with exit-code mapping.
    exit_codes: Numeric exit codes following clig.dev conventions.
    output: stdout/stderr formatting system with Rich support.
    parser: Load and normalize OpenAPI descriptions.
    tui: Session state machine, key handling, and rendering.
"""

__version__ = "0.1.0"
