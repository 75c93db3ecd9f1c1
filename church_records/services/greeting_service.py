def greet(name: str) -> str:
    return f"Hello, {name}! You've been greeted from Python!"
