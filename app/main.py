from dotenv import load_dotenv

from server import server

load_dotenv()

server_app = server.create_app()
