def list_related(relation, source, args, context):
    return list((source or {}).get(relation.name, []))
