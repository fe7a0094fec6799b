"""
Run the API with uvicorn: ``python -m cinecritic``.
"""

import uvicorn

from cinecritic.api.config import get_api_host, get_api_port


def main():
    uvicorn.run("cinecritic.api.main:app", host=get_api_host(), port=get_api_port())


if __name__ == "__main__":
    main()
