from gevent import monkey

# Must run before `requests` (and so `ssl`) is imported by the SendFox client.
monkey.patch_all()

from app import create_app  # noqa: E402

app = create_app()

if __name__ == "__main__":
    # Matches the local SERVER_NAME, storiesthatlead.localhost:8080.
    app.run(port=8080)
