"""Flask presentation layer for the expense tracker."""
