"""SIP projection engine and the Flask API that serves it."""
