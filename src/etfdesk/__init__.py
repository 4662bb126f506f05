"""ETF Desk - fund quotes, history, comparison and savings-plan analytics."""

__version__ = "0.1.0"
