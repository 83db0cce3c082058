"""TinyApp: a session-based URL shortener."""
