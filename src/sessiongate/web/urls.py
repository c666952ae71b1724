LOGIN_PATH = "/login"
WELCOME_PATH = "/benvenuto"
LOGOUT_PATH = "/logout"
