from taskservice.app import create_app

# Expose a module-level `app` for WSGI servers (gunicorn expects `app:app`).
# The MongoDB client connects lazily on the first request.
app = create_app()


if __name__ == "__main__":
    # Local development only; `python -m taskservice` checks the connection first.
    from taskservice.__main__ import main

    main()
