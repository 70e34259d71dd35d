"""Run the MonoFlux API with uvicorn: python -m monoflux"""

import uvicorn

from monoflux.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "monoflux.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
