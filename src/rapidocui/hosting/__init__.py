"""Hosting adapters serving the RapiDoc page from a web framework.

- rapidocui.hosting.fastapi: FastAPI / Starlette applications
- rapidocui.hosting.flask: Flask applications

Each adapter only imports its framework when used.
"""
