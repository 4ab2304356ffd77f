"""
Main entry point for the resume_engine package.

Usage:
    python -m resume_engine [command] [options]

See 'python -m resume_engine --help' for available commands.
"""

from resume_engine.cli import main

if __name__ == "__main__":
    main()
