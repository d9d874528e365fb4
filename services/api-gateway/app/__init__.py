"""
API Gateway - fronts the auth, sentiment, intent, RAG, journal and emotion services
"""
