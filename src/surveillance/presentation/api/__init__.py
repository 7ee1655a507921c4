"""
API package.
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from typing import Dict
from .routes import alerts, cameras, coverage

# Initialize main app
app = FastAPI(title="Perimeter Coverage Dashboard API")

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Dashboard front end is served separately
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(cameras.app.router, tags=["cameras"])
app.include_router(coverage.app.router, tags=["coverage"])
app.include_router(alerts.app.router, tags=["alerts"])

def init_app(components: Dict) -> FastAPI:
    """
    Wires built components (see SurveillanceApplicationBuilder) into the routes.
    """
    cameras.init_services(components['cameras'], components['coverage_service'], components['feeds'])
    coverage.init_service(components['coverage_service'])
    alerts.init_service(components['alert_service'])
    return app
