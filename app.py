# app.py
from diarias.main import create_app

# Objeto WSGI servido em produção (ex: gunicorn app:wsgi_app)
wsgi_app = create_app()

if __name__ == "__main__":
    wsgi_app.run(debug=True)
