#!/usr/bin/env python3
import os
from dotenv import load_dotenv
from church_records import create_app

# Load environment variables
load_dotenv()

# Create the Flask application; the schema is migrated before it is returned
app = create_app()

if __name__ == "__main__":
    port = int(os.environ.get("PORT", 5001))
    app.run(host="127.0.0.1", port=port, debug=os.getenv("FLASK_DEBUG") == "1")
