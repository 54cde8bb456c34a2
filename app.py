# Thin entrypoint running the reference data source scenario
from linesource import main


if __name__ == "__main__":  # pragma: no cover
    # Override sources via env or .env, e.g. HTTP_URL=... FILE_PATH=... python app.py
    main()
