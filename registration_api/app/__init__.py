"""
Application package initializer.

The service is split into a handful of layers: ``core`` holds
configuration, logging, exceptions and the spreadsheet adapter,
``services`` holds the roster reader and the registration workflow,
``schemas`` holds the request and response models and ``api`` exposes
everything over HTTP.  Routers live under ``api/<version>/`` so that a
new version can be added without touching the existing one.
"""
