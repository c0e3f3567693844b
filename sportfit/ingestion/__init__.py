"""
Ingestion layer: athlete stats from files and the stat store API.

Submodules:
  stat_records  — StatRecord construction from stat rows / snapshots, JSON file loader
  stats_client  — httpx client for the athlete CRUD API

Configuration:
  SPORTFIT_API_URL  — API base URL override (default: http://localhost:5000)
"""
