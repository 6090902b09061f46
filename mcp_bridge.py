#!/usr/bin/env python3
"""
NexMemory MCP Bridge launcher.

Configure with NEXMEMORY_API_KEY, NEXMEMORY_API_URL and DEBUG, then point
an MCP client at this script.
"""

from nexmemory.bridge import main

if __name__ == "__main__":
    main()
