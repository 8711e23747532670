"""
Article Frontend - Streamlit board for browsing and publishing articles.
"""

__version__ = "1.0.0"
