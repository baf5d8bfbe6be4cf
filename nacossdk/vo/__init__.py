"""Request parameter objects for configuration and naming calls."""