"""
Test suite for browser-demos.

Unit tests for the reporter, configuration, parsing, browser helpers,
walkthroughs and CLI. No test launches a real browser.
"""
