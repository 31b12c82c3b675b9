"""Console presentation layer for the expense tracker."""
