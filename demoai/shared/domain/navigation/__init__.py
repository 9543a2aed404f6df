from .navigator import AppNavigator, AppScreen, DashboardTab

__all__ = ["AppNavigator", "AppScreen", "DashboardTab"]
