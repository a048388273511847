from app.catalog import create_app

app = create_app()


if __name__ == "__main__":
    # Development server only; production runs gunicorn via scripts/start.py.
    app.run(host=app.config["HOST"], port=int(app.config["PORT"]), debug=True)
