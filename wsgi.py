from dotenv import load_dotenv
from postboard import create_app

load_dotenv()
app = create_app()
