def update_previous_names(old_name, new_name, previous_names):
    """
    Calcula o novo histórico de nomes de um artista que está sendo renomeado.

    O nome antigo entra no começo da lista, duplicatas são removidas mantendo
    a primeira ocorrência e o novo nome sai do histórico (caso o artista
    esteja voltando a um nome que já usou).

    Só deve ser chamada quando o nome realmente muda. Não altera a lista
    recebida.
    """
    names = []
    for name in [old_name, *previous_names]:
        if name not in names:
            names.append(name)

    return [name for name in names if name != new_name]
