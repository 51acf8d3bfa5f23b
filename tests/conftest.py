import os

from dotenv import load_dotenv

# load locally defined environmental variables, e.g. WORKERS_LOG_LEVEL
load_dotenv(dotenv_path=os.path.join(os.path.dirname(__file__), "env", "env.local"))
