"""Development server for the Material colour JSON service.

Usage
-----
$ pip install -e .
$ python main.py            # starts on http://127.0.0.1:5000

Endpoints: /scheme, /palette, POST /quantize, POST /source-color.
"""

from material_color.app import create_app

app = create_app()

if __name__ == "__main__":
    app.run(debug=True)
