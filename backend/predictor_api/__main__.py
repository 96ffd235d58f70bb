"""Process entry point — `python -m predictor_api`.

Invariants:
    - Listen address comes from settings
    - A failed store connection exits non-zero without serving (uvicorn aborts
      when the lifespan startup raises)
"""

import uvicorn

from predictor_api.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "predictor_api.main:app",
        host=settings.host,
        port=settings.port,
        lifespan="on",
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
