from .todos import router as todos_router
from .users import router as users_router
