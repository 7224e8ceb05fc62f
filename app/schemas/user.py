from pydantic import BaseModel


class UserCreate(BaseModel):
    name: str
    email: str
    # stored as given; hash before calling
    password: str

    class Config:
        json_schema_extra = {
            "example": {
                "name": "Eva Stanley",
                "email": "sebastianguerra@ymail.com",
                "password": "$2a$10$FB/BOAVhpuLvpOREQVmvmezD4ED/.JBIDRh70tGevYzYzQgFId2u.",
            }
        }
