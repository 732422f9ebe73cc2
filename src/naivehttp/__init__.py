"""
naivehttp - a naive httpie-style command-line HTTP client.

Issues GET and POST requests (POST bodies built from key=value pairs
and sent as JSON) and pretty-prints the response status line, headers
and body.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

__version__ = "0.1.0"
__author__ = "DNS Science.io"
__copyright__ = "Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company"
