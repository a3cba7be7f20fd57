"""
Auction Search API package
"""
