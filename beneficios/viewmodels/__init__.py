"""ViewModel package for UI state.

Call context:
    ``beneficios.web_ui`` screen controllers own instances of these viewmodels
    and the NiceGUI page binds widgets to them.

Dependencies:
    Modules in this package depend on domain types only. I/O adapters and
    use-case orchestration remain outside.

Responsibilities:
    - Hold form input, touched flags, and local validation.
    - Project domain entities into table rows and filter them.
    - Hold transient notifications and application settings.
"""
