from setuptools import setup, find_packages

setup(
    name="sed-mcp",
    version="0.1.0",
    description="Regex-driven sed-style text transformations with a CLI & MCP stdio tool server",
    packages=find_packages(include=["sedmcp", "sedmcp.*"]),
    install_requires=[
        "typer<0.26",
        "click",
        "rich",
        "python-dotenv",
        "mcp>=1.20,<2",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "sedmcp=sedmcp.cli.app:app",
        ],
    },
    python_requires=">=3.11",
)
