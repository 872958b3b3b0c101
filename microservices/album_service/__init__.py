"""
Album Service

Album record microservice.
Creates album records with server-generated identifiers and looks them up by id.

Port: 8080
"""

__version__ = "1.0.0"
__service_name__ = "album_service"
__service_port__ = 8080
