from hms import create_app
from hms.extensions import dispose_pool

app = create_app()

if __name__ == "__main__":
	try:
		app.run(host="0.0.0.0", port=5000, threaded=True)
	finally:
		dispose_pool(app)
