#setup: python -m venv .venv
#setup: source .venv/bin/activate   # (windows: .venv\Scripts\activate)
#setup: pip install -U pip -e ".[test]"
#setup: UPSTREAM_RATES_URL=https://... flask --app hylo_rates.wsgi run --port 3000 --debug

from hylo_rates.app import create_app

app = create_app()


if __name__ == "__main__":
    app.run(port=3000, debug=True)
