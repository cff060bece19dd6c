"""Storefront: cart ledger, catalog, content pages and admin API over Supabase."""
