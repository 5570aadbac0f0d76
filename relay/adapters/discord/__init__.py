"""Discord adapter: discord.py client and message conversion."""
