"""Command line helper for the HMRC OAuth flow"""
