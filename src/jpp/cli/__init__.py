"""
JPP Command-Line Interface
==========================

- **jpplex**: scan a source file (or the built-in demo program) and print
  its tokens

Each tool is implemented as a Click-based CLI application.
"""

__all__ = ["jpplex"]
