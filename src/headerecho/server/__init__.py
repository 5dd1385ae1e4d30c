"""ASGI request pipeline, response sending, and the uvicorn runner."""
