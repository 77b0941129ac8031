"""Mood Palette — FastAPI REST API layer.

This package contains the FastAPI application, Pydantic request/response
models, and the palette generation pipeline.

Modules
-------
main
    FastAPI application factory, route handlers, and the ``main()`` CLI
    entry point.
models
    Pydantic models for API request and response validation.
prompt_builder
    Instruction prompt compilation for the text model.
extraction
    Recovery of a JSON object from raw model text.
shaping
    Normalisation of the extracted object into the response contract.
errors
    API error taxonomy and its HTTP status mapping.
"""
