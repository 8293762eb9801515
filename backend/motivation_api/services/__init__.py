"""Services Layer: orchestration between the Gemini client and the routes."""
