from fastapi.security import HTTPBearer

# Extracts "Authorization: Bearer <token>"; auto_error is off so missing
# tokens get our own 401 message
bearer_scheme = HTTPBearer(auto_error=False)
