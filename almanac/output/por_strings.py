# pylint: skip-file

"""
Portuguese Strings.

Mirror of eng_strings; any string missing here falls back to English.
"""

"""'''''''''''
Command Errors
'''''''''''"""

command_error_header = "**Erro:** "
command_error_user_input_error = "Erro na entrada do usuário."
command_error_conversion_error = "Falha ao converter o argumento."
command_error_bad_argument = "Argumento inválido."
command_error_missing_required_argument = "Falta um argumento obrigatório."
command_error_invoke_error = "❌ Ocorreu um erro ao executar o comando."
command_error_too_many_arguments = "Argumentos demais."
command_error_not_owner = "Comando restrito ao dono do bot."


"""''''''''''''''''
Meses do Calendário
''''''''''''''''"""

month_1 = "janeiro"
month_2 = "fevereiro"
month_3 = "março"
month_4 = "abril"
month_5 = "maio"
month_6 = "junho"
month_7 = "julho"
month_8 = "agosto"
month_9 = "setembro"
month_10 = "outubro"
month_11 = "novembro"
month_12 = "dezembro"


"""''''''''''''''
Cog do Calendário
''''''''''''''"""

calendar_help_title = "🧭 COMANDOS DO BOT DE CALENDÁRIO"
calendar_help_desc = (
    "📅 `%PREFIX%addevento <AAAA-MM-DD> \"<nome>\" [\"local\"] [hora]` — Adiciona um novo evento (use aspas em nomes e locais com espaços)\n"
    "🗓️ `%PREFIX%listeventos` — Mostra todos os eventos cadastrados\n"
    "🗑️ `%PREFIX%removeevento <AAAA-MM-DD>` — Remove os eventos de uma data\n"
    "🕐 O bot avisa automaticamente quando houver um evento no dia!"
)

calendar_summary_header = "**📅 {} {}**"
calendar_summary_empty = "_Sem eventos registrados neste mês._"
calendar_listing_header = "**🗓️ Eventos cadastrados:**"
calendar_listing_empty = "📭 Nenhum evento cadastrado."
calendar_reminder = "📣 **Lembrete:** Hoje acontece **{}**!"

calendar_add_success = "✅ Evento adicionado: **{}** ({})"
calendar_remove_success = "🗑️ {} evento(s) removido(s) da data {}."

calendar_invalid_date_title = "⚠️ Data inválida"
calendar_invalid_date_desc = "Use o formato de data: AAAA-MM-DD (recebido `{}`)."
calendar_empty_name_title = "⚠️ Nome ausente"
calendar_empty_name_desc = "O evento precisa de um nome."
calendar_duplicate_event_title = "⚠️ Evento duplicado"
calendar_duplicate_event_desc = "**{}** já está cadastrado em {}."
calendar_not_found_title = "⚠️ Não encontrado"
calendar_not_found_desc = "Nenhum evento encontrado nessa data ({})."

bot_shutdown = "Já volto."
