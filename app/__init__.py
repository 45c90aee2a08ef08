from dotenv import load_dotenv

# Load environment variables from .env file before settings/logging read them
load_dotenv()
