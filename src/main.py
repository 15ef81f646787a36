"""Main entry point for the Smart Task Manager demo."""
from cli import main

if __name__ == "__main__":
    main()
