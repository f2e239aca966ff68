# backend/wsgi.py
# FLASK_APP=wsgi.py python -m flask run, or python wsgi.py

from stockroom import create_app

app = create_app()


if __name__ == "__main__":
    app.run(host="0.0.0.0", port=app.config["PORT"])
