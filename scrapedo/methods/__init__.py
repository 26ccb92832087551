"""
Orchestration of single Scrape.do API calls.
"""
