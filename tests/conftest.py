from config import ApplicationConfig

# Minimum bcrypt cost keeps the suite fast
ApplicationConfig.BCRYPT_ROUNDS = 4
