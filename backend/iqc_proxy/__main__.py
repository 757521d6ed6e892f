"""Process entry point — `python -m iqc_proxy` or the `iqc-proxy` script."""

import uvicorn

from iqc_proxy.config import get_settings


def main():
    settings = get_settings()
    uvicorn.run(
        "iqc_proxy.main:app",
        host=settings.listen_host,
        port=settings.listen_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
