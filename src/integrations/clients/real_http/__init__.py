"""
Real HTTP integration clients.

These clients communicate with real endpoints via HTTP:
- api_caller: third-party endpoints exercised by the test catalog and the custom tester
- mock_service_client: the local mock service's description-driven generator

Important:
- Must return data shaped according to src/integrations/contracts/*
- Tests inject an httpx transport instead of touching the network
"""
