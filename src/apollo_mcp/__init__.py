"""Apollo.io MCP Server.

Search and enrich people and companies from your AI assistant or the terminal.
People/company search, enrichment, job postings, and news from the Apollo.io API.
"""

__version__ = "0.1.0"
