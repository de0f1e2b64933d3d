"""Command handlers. Each module exposes ``async def handle(ctx)``."""
