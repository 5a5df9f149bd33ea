"""View rendering module for HTML templates.

This module handles template processing and page assembly, separate from the HTTP routers.
Route handlers collect content blocks with a TemplateRenderer; the page layout is rendered last.
"""
