"""HTTP routers: storefront, cart, content pages, auth and admin."""
