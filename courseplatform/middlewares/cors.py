from starlette.middleware.cors import CORSMiddleware

from courseplatform.config import AppSettings


def setup_cors(app, settings: AppSettings):
    # Development origins
    dev_origins = [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    # Combine with origins from settings
    all_origins = sorted(set(dev_origins + settings.allowed_origins))

    app.add_middleware(
        CORSMiddleware,
        allow_origins=all_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        max_age=3600,
    )
