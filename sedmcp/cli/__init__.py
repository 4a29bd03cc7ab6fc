# sedmcp/cli/__init__.py
# Typer command-line interface
