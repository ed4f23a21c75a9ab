"""I/O-free filesystem coroutines with blocking and asyncio runtimes, and a small command line."""

__version__ = "1.0.0"