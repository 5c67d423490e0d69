#!/usr/bin/env python3
"""
Main entry point for tchat
"""

from tchat.main import run

if __name__ == "__main__":
    run()
