"""Task tracker service: FastAPI app, domain, application and infrastructure layers."""
