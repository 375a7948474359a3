import os

from dotenv import load_dotenv


class Config:
    def __init__(self) -> None:
        load_dotenv()

        self.API_URL = os.getenv("PLANTAO_API_URL", "http://localhost:8080")
        self.STORAGE_PATH = os.getenv(
            "PLANTAO_STORAGE_PATH",
            os.path.join("~", ".plantao", "storage.json"),
        )
        self.LOGIN_PAGE = os.getenv("PLANTAO_LOGIN_PAGE", "login.html")
        self.ADMIN_PAGE = os.getenv("PLANTAO_ADMIN_PAGE", "admin.html")
