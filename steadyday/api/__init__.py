"""SteadyDay HTTP API

FastAPI application exposing every feature package under /api.

Usage:
    uvicorn steadyday.api.main:app --host 127.0.0.1 --port 8000 --reload

    Or through the CLI:
    steadyday serve
"""
