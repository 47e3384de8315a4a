"""
Сессия администратора в подписанной cookie (Starlette SessionMiddleware).
"""
from fastapi import HTTPException, Request, status

SESSION_AUTH_KEY = "admin_authenticated"
SESSION_USERNAME_KEY = "admin_username"


def login_session(request: Request, username: str) -> None:
    request.session[SESSION_AUTH_KEY] = True
    request.session[SESSION_USERNAME_KEY] = username


def logout_session(request: Request) -> None:
    request.session.clear()


def is_admin_session(request: Request) -> bool:
    return request.session.get(SESSION_AUTH_KEY) is True


async def require_admin_user(request: Request) -> str:
    """
    Dependency для требования авторизации.
    Возвращает логин из сессии или 401 ошибку.
    """
    if not is_admin_session(request):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Требуется авторизация"
        )
    return request.session.get(SESSION_USERNAME_KEY, "")
