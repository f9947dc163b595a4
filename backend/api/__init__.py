"""REST API routers: pages, site data and content drafting"""
