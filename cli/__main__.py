"""
Entry point for running the CLI as a module: `python -m cli`

Examples:
  python -m cli show                # Resolved config for the working directory
  python -m cli paths -c app.toml   # Derived paths for an explicit file
  python -m cli colors              # Log color per component
"""

from cli import main

if __name__ == "__main__":
    main()
