_ES_SUFFIXES = ("sses", "ches", "shes", "xes", "zes")


def singularize(resource: str) -> str:
    """Turn a plural resource name into its singular form: deployments -> deployment."""
    if resource.endswith("ies"):
        return resource[:-3] + "y"
    if resource.endswith(_ES_SUFFIXES):
        return resource[:-2]
    if resource.endswith("s") and not resource.endswith("ss"):
        return resource[:-1]
    return resource
