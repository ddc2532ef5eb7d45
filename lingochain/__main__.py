"""
Entry point for running LingoChain as a module.

Usage:
    python -m lingochain --help
    python -m lingochain translate "Hello" --target te
    python -m lingochain romanize "नमस्ते" --lang hi
"""
from .cli import app


if __name__ == "__main__":
    app()
