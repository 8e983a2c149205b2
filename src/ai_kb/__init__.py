"""ai-kb - builds AI-ready knowledge base files from project sources"""

__version__ = "0.3.0"
