"""Infrastructure layer — platform directories, file I/O, JSON codec.

This layer depends on stdlib and third-party libs (platformdirs,
pydantic). It raises :mod:`dirjson.domain.errors` exceptions and leaves
converting them into return values to the service layer.
"""
