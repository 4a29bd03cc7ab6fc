# sedmcp/__main__.py
# Entry point for `python -m sedmcp`

from .cli.app import app

if __name__ == "__main__":
    app(prog_name="sedmcp")
