"""Internal modules for the SHNetwork gateway.

These are not intended for direct use in application code.

Modules:
    config - Shared base URL and default headers
    params - Parameter sanitization, query strings, header merging
    engine - httpx-backed HTTP engine
    codec - Response reshaping per result kind
    http - Shared HTTP client configuration
"""
