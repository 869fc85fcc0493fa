import os

from src.hr_admin.hr_admin.main import create_app

app = create_app()

if __name__ == "__main__":
    app.run(debug=app.config["DEBUG"], port=int(os.getenv("PORT", "5000")))
