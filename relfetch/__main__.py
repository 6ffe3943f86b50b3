from relfetch.interfaces.cli import app


if __name__ == "__main__":
    raise SystemExit(app())
