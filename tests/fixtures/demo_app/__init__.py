"""Demo application: three services and a component using all of them."""
