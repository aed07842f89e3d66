"""
Main entry point for the job_board package.

Usage:
    python -m job_board [command] [options]

See 'python -m job_board --help' for available commands.
"""

from job_board.cli import main

if __name__ == "__main__":
    main()
