# Ensure the repository root is on sys.path so tests can import the
# `diagnostic_gateway` package without installing it
import os
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Dummy configuration, set before diagnostic_gateway.config is imported.
# No test talks to a real Supabase project or to Google.
os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_SERVICE_ROLE_KEY", "test-service-role-key")
os.environ.setdefault("RECAPTCHA_SECRET_KEY", "test-recaptcha-secret")
