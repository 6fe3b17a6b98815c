"""Internal modules for the ServiceStack client.

WARNING: These modules back JsonServiceClient and are not part of the public API.

Modules:
    codec - Request encoding and response decoding
    http - Default HTTP transport configuration
    redaction - Masking of sensitive values in debug output
"""
