"""
textpolish - improve a piece of text from the command line using an LLM.
"""

__version__ = "0.1.0"
