"""DemoAI console front-end."""
