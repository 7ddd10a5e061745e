"""Core utilities and shared infrastructure.

- config: Parser configuration loading and validation
- constants: Named constants shared by config and the parsers
- events: Parse event listener interface and logging listener
- exceptions: Exception taxonomy
"""
