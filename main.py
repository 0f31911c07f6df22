# main.py

from subprocess import run

from cms.configs import settings
from cms.main import app


def start(cmmd: list[str]) -> None:
    run(cmmd, check=True)


def main() -> None:
    cmmd = [
        "uvicorn",
        "cms.main:app",
        "--host",
        settings.HOST,
        "--port",
        str(settings.PORT),
        "--log-level",
        settings.LOG_LEVEL.lower(),
        "--loop",
        "uvloop",
        "--http",
        "httptools",
    ]
    if settings.DEBUG:
        cmmd.append("--reload")
    start(cmmd)


if __name__ == "__main__":
    __all__ = ["app"]
    main()
